"""
TASKZ - Installer
=================
Copies the taskz launcher into a directory on the system PATH so it can
be run from anywhere. Needs administrator/root rights for the default
targets.
"""

import logging
import shutil
import sys
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def default_install_path() -> Path:
    if sys.platform == "win32":
        return Path("C:\\Windows\\System32\\taskz.exe")
    return Path("/usr/local/bin/taskz")


class Installer:
    """
    Install/uninstall capability; failures are reported, not raised.

    The default source is the running launcher. For a pip-installed
    `taskz` that is a small wrapper script whose shebang points at the
    interpreter it was installed with, so the copy only works while that
    interpreter (and its environment) stays in place.
    """

    def __init__(
        self,
        target: Optional[Union[str, Path]] = None,
        source: Optional[Union[str, Path]] = None
    ):
        self.target = Path(target) if target else default_install_path()
        self.source = Path(source) if source else Path(sys.argv[0]).resolve()

    def is_installed(self) -> bool:
        return self.target.exists()

    def install(self) -> bool:
        """Copy the launcher to the target path"""
        if not self.source.is_file():
            logger.error(f"❌ Cannot install: launcher not found at {self.source}")
            return False
        try:
            shutil.copy2(self.source, self.target)
        except PermissionError as e:
            logger.error(f"❌ Permission denied writing {self.target}, run as administrator ({e})")
            return False
        except OSError as e:
            logger.error(f"❌ Installation to {self.target} failed: {e}")
            return False

        logger.info(f"✅ Installed {self.source} -> {self.target}")
        return True

    def uninstall(self) -> bool:
        """Remove the installed launcher; False if there was nothing to remove"""
        if not self.is_installed():
            logger.warning(f"No installation found at {self.target}")
            return False
        try:
            self.target.unlink()
        except PermissionError as e:
            logger.error(f"❌ Permission denied removing {self.target}, run as administrator ({e})")
            return False
        except OSError as e:
            logger.error(f"❌ Uninstallation from {self.target} failed: {e}")
            return False

        logger.info(f"✅ Uninstalled {self.target}")
        return True
