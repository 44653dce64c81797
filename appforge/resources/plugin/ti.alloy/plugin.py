"""Build plugin hook: compiles the app directory before every build."""

import os
import subprocess


def compile(config):
    project_dir = config["project_dir"]
    if not os.path.isdir(os.path.join(project_dir, "app")):
        return
    subprocess.check_call(["alloy", "compile", project_dir, "--no-colors"])
