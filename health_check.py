"""
health_check.py - startup health check for the application
"""
import importlib.util
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import streamlit as st
import yaml

logger = logging.getLogger("mindmap_genius.health")

DEFAULT_CONFIG = {
    'layout': {
        'center_x': 300,
        'center_y': 200,
        'base_radius': 100,
        'ring_spacing': 80,
    },
    'render': {
        'label_max_length': 15,
        'label_offset': 50,
    },
    'animation': {
        'level_delay': 0.2,
        'sibling_delay': 0.1,
        'label_lag': 0.2,
    },
    'generator': {
        'allowed_extensions': ['txt', 'pdf', 'doc', 'docx'],
    },
    'logging': {
        'error_log': 'logs/error.log',
        'level': 'INFO',
    },
    'export': {
        'directory': 'exports',
    },
}


class HealthChecker:
    """Check the application state at startup."""

    REQUIRED_DIRS = ['logs', 'exports', 'config']
    ESSENTIAL_MODULES = ['streamlit', 'plotly', 'networkx', 'yaml']

    def __init__(self, base_dir: str = '.'):
        self.base_dir = Path(base_dir)
        self.issues: List[str] = []
        self.warnings: List[str] = []
        self.success: List[str] = []

    def check_all(self) -> Tuple[bool, Dict[str, List[str]]]:
        """Run every check."""
        self._ensure_directories()
        self._ensure_config_files()
        self._check_modules()

        return len(self.issues) == 0, {
            'issues': self.issues,
            'warnings': self.warnings,
            'success': self.success
        }

    def _ensure_directories(self):
        """Create the required directories."""
        for dir_path in self.REQUIRED_DIRS:
            (self.base_dir / dir_path).mkdir(parents=True, exist_ok=True)

        self.success.append("✅ Directory layout ready")

    def _ensure_config_files(self):
        """Write the default config file if it is missing."""
        config_path = self.base_dir / 'config' / 'config.yaml'
        if config_path.exists():
            self.success.append("✅ config/config.yaml found")
            return

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(DEFAULT_CONFIG, f, allow_unicode=True, sort_keys=False)
        self.warnings.append("⚠️  config/config.yaml created with default settings")

    def _check_modules(self):
        """Check that the essential modules are importable."""
        missing = [m for m in self.ESSENTIAL_MODULES if importlib.util.find_spec(m) is None]

        if missing:
            self.issues.append(f"❌ Missing Python modules: {', '.join(missing)}")
        else:
            self.success.append("✅ All essential modules are installed")


def display_health_status(report: Optional[Dict[str, List[str]]] = None, is_healthy: bool = True):
    """Show the health report in the sidebar, only when something is wrong."""
    if report is None or (is_healthy and not report['warnings']):
        return

    with st.sidebar:
        with st.expander("🏥 Health", expanded=not is_healthy):
            if report['issues']:
                st.error("**Critical problems:**")
                for issue in report['issues']:
                    st.write(issue)

            if report['warnings']:
                st.warning("**Warnings:**")
                for warning in report['warnings']:
                    st.write(warning)

            if not is_healthy:
                st.error("⚠️ The application may not work correctly")


def ensure_app_health(base_dir: str = '.'):
    """Check and repair the application state at startup."""
    checker = HealthChecker(base_dir)
    is_healthy, report = checker.check_all()

    if not is_healthy:
        logger.error("Problems detected at startup: %s", "; ".join(report['issues']))
    for warning in report['warnings']:
        logger.warning(warning)

    return is_healthy, report


__all__ = ['HealthChecker', 'display_health_status', 'ensure_app_health']
