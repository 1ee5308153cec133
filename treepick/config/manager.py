"""Configuration management for treepick.

This module handles loading, saving, and validating configuration settings,
including the matching mode and the look of the navigation screen.
"""

import json
import os
from typing import Dict, Any, Optional
from rich.console import Console
from rich.panel import Panel
from ..navigation.matcher import CASE_SENSITIVITY_MODES
from ..utils.constants import DEFAULT_CONFIG_DIR
from .defaults import default_config, get_config_path, sanitize_config_name

class ConfigManager:
    """Manages configuration for treepick.

    Configuration files are JSON documents stored in a single directory, one
    file per configuration name.
    """

    def __init__(self, console: Optional[Console] = None, config_dir: str = DEFAULT_CONFIG_DIR):
        """Initialize the ConfigManager.

        Args:
            console: Rich console for output (optional, defaults to stderr)
            config_dir: Directory holding the configuration files
        """
        self.console = console or Console(stderr=True)
        self.config_dir = config_dir

    def config_exists(self, config_name: Optional[str] = None) -> bool:
        """Check if a configuration file exists without printing messages.

        Args:
            config_name: Optional name of the config to check (defaults to 'default')

        Returns:
            bool: True if the configuration file exists, False otherwise
        """
        return os.path.exists(self._get_config_path(config_name))

    def load_configuration(self, config_name: Optional[str] = None) -> Dict[str, Any]:
        """Load settings from a configuration file.

        Missing or unreadable files yield the default configuration.

        Args:
            config_name: Optional name of the config to load (defaults to 'default')

        Returns:
            Dict containing the configuration settings
        """
        config_path = self._get_config_path(config_name)

        if not os.path.exists(config_path):
            self.console.print(Panel(
                f"[yellow]Configuration file not found:[/yellow]\n"
                f"[blue]{config_path}[/blue]",
                title="Config Not Found", border_style="yellow", expand=False
            ))
            return default_config()

        try:
            with open(config_path, 'r') as f:
                config_data = json.load(f)
            return self._validate_config(config_data)

        except (OSError, ValueError) as e:
            self.console.print(Panel(
                f"[red]Error loading configuration:[/red]\n"
                f"{str(e)}",
                title="Error", border_style="red", expand=False
            ))
            return default_config()

    def save_configuration(self, config_data: Dict[str, Any], config_name: Optional[str] = None) -> bool:
        """Save settings to a configuration file.

        Args:
            config_data: Dictionary containing the configuration to save
            config_name: Optional name for the config (defaults to 'default')

        Returns:
            bool: True if saved successfully, False otherwise
        """
        config_path = self._get_config_path(config_name)

        try:
            os.makedirs(self.config_dir, exist_ok=True)
            with open(config_path, 'w') as f:
                json.dump(config_data, f, indent=2)

            self.console.print(Panel(
                f"[green]Configuration saved successfully to:[/green]\n"
                f"[blue]{config_path}[/blue]",
                title="Config Saved", border_style="green", expand=False
            ))
            return True

        except OSError as e:
            self.console.print(Panel(
                f"[red]Error saving configuration:[/red]\n"
                f"{str(e)}",
                title="Error", border_style="red", expand=False
            ))
            return False

    def reset_configuration(self) -> Dict[str, Any]:
        """Reset configuration to default.

        Returns:
            Dict containing the default configuration
        """
        config = default_config()

        self.console.print(Panel(
            "[green]Configuration reset to defaults![/green]\n"
            "• Smart case matching\n"
            "• Help line shown\n"
            "• Default colours",
            title="Config Reset", border_style="green", expand=False
        ))

        return config

    def _get_config_path(self, config_name: Optional[str]) -> str:
        """Get the full path to a configuration file.

        Args:
            config_name: Name of the configuration, None for 'default'

        Returns:
            str: Full path to the configuration file
        """
        return get_config_path(sanitize_config_name(config_name or "default"), self.config_dir)

    def _validate_config(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate configuration data and provide defaults for missing fields.

        Args:
            config_data: Configuration data to validate

        Returns:
            Dict: Validated configuration with defaults applied where needed
        """
        validated = default_config()

        if not isinstance(config_data, dict):
            self.console.print("[yellow]Configuration is not a JSON object, using defaults.[/yellow]")
            return validated

        if "matching" in config_data and isinstance(config_data["matching"], dict):
            case_sensitivity = config_data["matching"].get("caseSensitivity")
            if case_sensitivity in CASE_SENSITIVITY_MODES:
                validated["matching"]["caseSensitivity"] = case_sensitivity
            elif case_sensitivity is not None:
                self.console.print(
                    f"[yellow]Unknown caseSensitivity {case_sensitivity!r}, "
                    f"using {validated['matching']['caseSensitivity']!r}.[/yellow]"
                )

        if "displaySettings" in config_data and isinstance(config_data["displaySettings"], dict):
            if "showHelp" in config_data["displaySettings"]:
                validated["displaySettings"]["showHelp"] = bool(config_data["displaySettings"]["showHelp"])

        if "style" in config_data and isinstance(config_data["style"], dict):
            for style_class, style in config_data["style"].items():
                if isinstance(style_class, str) and isinstance(style, str):
                    validated["style"][style_class] = style

        return validated
