"""Tests for environment-derived defaults."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
from pathlib import Path
from unittest.mock import patch

import pytest

from localworker.state.defaults import SUBPROCESS_IMPLEMENTATION_JAR, EnvironmentDefaults


class TestEnvironmentDefaults:
    """Reading defaults from the environment."""

    def test_java_home(self):
        """The java binary lives under JAVA_HOME."""
        defaults = EnvironmentDefaults.from_environment({"JAVA_HOME": "/opt/jdk"})
        assert defaults.java_binary == str(Path("/opt/jdk") / "bin" / "java")

    def test_java_on_path(self):
        """Without JAVA_HOME, java is looked up on PATH."""
        with patch("shutil.which", return_value="/usr/bin/java"):
            defaults = EnvironmentDefaults.from_environment({})
        assert defaults.java_binary == "/usr/bin/java"

    def test_java_missing(self):
        """Bare 'java' is used when nothing else is known."""
        with patch("shutil.which", return_value=None):
            defaults = EnvironmentDefaults.from_environment({})
        assert defaults.java_binary == "java"

    def test_overrides(self):
        """Script and worker artifact come from their variables."""
        defaults = EnvironmentDefaults.from_environment(
            {
                "JAVA_HOME": "/opt/jdk",
                "LOCALWORKER_EXECUTE_SCRIPT": "/srv/executeWorkflow.sh",
                "LOCALWORKER_WORKER_JAR": "/srv/server.worker.jar",
            }
        )
        assert defaults.execute_workflow_script == "/srv/executeWorkflow.sh"
        assert defaults.server_worker_jar == "/srv/server.worker.jar"

    def test_packaged_worker_jar(self):
        """The worker artifact defaults to the packaged resource."""
        defaults = EnvironmentDefaults.from_environment({"JAVA_HOME": "/opt/jdk"})
        assert defaults.execute_workflow_script is None
        assert defaults.server_worker_jar.endswith(str(Path(SUBPROCESS_IMPLEMENTATION_JAR)))

    def test_reads_process_environment(self, monkeypatch):
        """os.environ is used when no mapping is given."""
        monkeypatch.setenv("LOCALWORKER_EXECUTE_SCRIPT", "/env/run.sh")
        assert EnvironmentDefaults.from_environment().execute_workflow_script == "/env/run.sh"

    def test_frozen(self):
        """Defaults cannot be changed after startup."""
        defaults = EnvironmentDefaults.from_environment({"JAVA_HOME": "/opt/jdk"})
        with pytest.raises(AttributeError):
            defaults.java_binary = "/tmp/java"
