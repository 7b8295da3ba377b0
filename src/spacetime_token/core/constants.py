"""Constants and default values for spacetime-token.

This module centralizes file names, default settings and display
constants used throughout the application.
"""

# ==================== APPLICATION PATHS ====================

# Directory name under the platform config directory (e.g. ~/.config/spacetime-token)
APP_DIR_NAME: str = "spacetime-token"

# Environment variable overriding the app config directory
APP_HOME_ENV_VAR: str = "SPACETIME_TOKEN_HOME"

# Settings file inside the app config directory (not itself configurable)
SETTINGS_FILENAME: str = "config.toml"

# ==================== SETTINGS DEFAULTS ====================

DEFAULT_PROFILES_FILENAME: str = "profiles.toml"
DEFAULT_CLI_CONFIG_DIR_FROM_HOME: str = ".config/spacetime"
DEFAULT_CLI_CONFIG_FILENAME: str = "cli.toml"
DEFAULT_CLI_TOKEN_KEY: str = "spacetimedb_token"

# Prompt labels used by `setup`, keyed by AppSettings field name
SETTINGS_PROMPTS: dict[str, str] = {
    "profiles_filename": "Profiles filename",
    "cli_config_dir_from_home": "SpacetimeDB CLI config directory (from home)",
    "cli_config_filename": "SpacetimeDB CLI config filename",
    "cli_token_key": "SpacetimeDB CLI token key",
}

# ==================== EXTERNAL CLI ====================

SPACETIME_CLI_COMMAND: str = "spacetime"
LOGOUT_ARGS: tuple[str, ...] = ("logout",)
LOGIN_ARGS: tuple[str, ...] = ("login", "--server-issued-login", "local")

# ==================== PROFILES ====================

ADMIN_PROFILE_NAME: str = "admin"

# Profiles file holds bearer tokens; keep it private to the user
PROFILES_FILE_MODE: int = 0o600

# Tokens at or below this length are displayed unmasked
MASK_MIN_LENGTH: int = 10
MASK_VISIBLE_CHARS: int = 5

# ==================== DISPLAY CONSTANTS ====================

# Width of banner separator lines (used across CLI output)
BANNER_WIDTH: int = 60

# ==================== LOGGING ====================

DEFAULT_LOG_LEVEL: str = "WARNING"
VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FILE_MAX_BYTES: int = 1024 * 1024  # 1MB
LOG_FILE_BACKUP_COUNT: int = 3
