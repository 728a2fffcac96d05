"""Project creation stages for rac."""

from .cleanup import clean_project, enter_project, init_project, write_env_file
from .fetch import clone_template
from .install import PACKAGE_MANAGERS, PackageManager, detect_package_manager, install_packages
from .manifest import dump_manifest, load_manifest, patch_manifest
from .prompts import prompt_project_name, prompt_template, validate_project_name

__all__ = [
    "clean_project",
    "enter_project",
    "init_project",
    "write_env_file",
    "clone_template",
    "PACKAGE_MANAGERS",
    "PackageManager",
    "detect_package_manager",
    "install_packages",
    "dump_manifest",
    "load_manifest",
    "patch_manifest",
    "prompt_project_name",
    "prompt_template",
    "validate_project_name",
]
