"""
Configuration module for the EITANGOS vocabulary monitor.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of eitangos/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Output
# =============================================================================

# Same as --verbose
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"


# =============================================================================
# Appwrite Configuration
# =============================================================================

# Appwrite API endpoint (cloud or self-hosted)
APPWRITE_ENDPOINT: str = os.getenv("APPWRITE_ENDPOINT", "https://cloud.appwrite.io/v1")

# Project, key and database coordinates; all required for uploads
APPWRITE_PROJECT_ID: str = os.getenv("APPWRITE_PROJECT_ID", "")
APPWRITE_API_KEY: str = os.getenv("APPWRITE_API_KEY", "")
APPWRITE_DATABASE_ID: str = os.getenv("APPWRITE_DATABASE_ID", "")
APPWRITE_COLLECTION_ID: str = os.getenv("APPWRITE_COLLECTION_ID", "")

# Document attribute names for the two halves of a vocabulary pair
APPWRITE_TERM_FIELD: str = os.getenv("APPWRITE_TERM_FIELD", "english")
APPWRITE_TRANSLATION_FIELD: str = os.getenv("APPWRITE_TRANSLATION_FIELD", "japanese")


# =============================================================================
# Twitter / X Configuration
# =============================================================================

# App-only bearer token for the v2 API
TWITTER_BEARER_TOKEN: str = os.getenv("TWITTER_BEARER_TOKEN", "")

# Numeric user ID of the account to monitor
TWITTER_USER_ID: str = os.getenv("TWITTER_USER_ID", "")

# Display name only; lookups use TWITTER_USER_ID
TWITTER_USERNAME: str = os.getenv("TWITTER_USERNAME", "eitangos")


# =============================================================================
# Polling Configuration
# =============================================================================

# Seconds between polls
# Default: 60 seconds
CHECK_INTERVAL: int = int(os.getenv("CHECK_INTERVAL", "60"))

# Longer intervals are almost certainly a value written in milliseconds
MAX_CHECK_INTERVAL: int = 24 * 60 * 60

# Posts requested per poll (API accepts 5..100)
MAX_RESULTS: int = int(os.getenv("MAX_RESULTS", "10"))

# HTTP request timeout in seconds
REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))

# File holding the id of the last processed post
LAST_POST_ID_FILE: str = os.getenv("LAST_POST_ID_FILE", "last_tweet_id.txt")


# =============================================================================
# Helper Functions
# =============================================================================

def validate_polling(
    interval: float,
    max_results: int,
    interval_name: str = "CHECK_INTERVAL",
    max_results_name: str = "MAX_RESULTS",
) -> list[str]:
    """
    Check polling settings, whether they come from the environment or the CLI.
    
    Returns:
        List of problems (empty if all valid).
    """
    errors = []
    
    if interval < 1:
        errors.append(f"{interval_name} must be at least 1 second")
    elif interval > MAX_CHECK_INTERVAL:
        errors.append(
            f"{interval_name} is in seconds; {interval:g} is more than a day "
            f"(was it written in milliseconds?)"
        )
    
    if not (5 <= max_results <= 100):
        errors.append(f"{max_results_name} must be between 5 and 100")
    
    return errors


def validate_config(
    require_twitter: bool = True,
    require_appwrite: bool = True,
) -> list[str]:
    """
    Validate that required configuration is present.
    
    Args:
        require_twitter: Check the credentials needed to fetch posts.
        require_appwrite: Check the credentials needed to store pairs.
    
    Returns:
        List of missing or invalid configuration keys (empty if all valid).
    """
    errors = []
    
    if require_twitter:
        if not TWITTER_BEARER_TOKEN:
            errors.append("TWITTER_BEARER_TOKEN is required")
        if not TWITTER_USER_ID:
            errors.append("TWITTER_USER_ID is required")
    
    if require_appwrite:
        if not APPWRITE_PROJECT_ID:
            errors.append("APPWRITE_PROJECT_ID is required")
        if not APPWRITE_API_KEY:
            errors.append("APPWRITE_API_KEY is required")
        if not APPWRITE_DATABASE_ID:
            errors.append("APPWRITE_DATABASE_ID is required")
        if not APPWRITE_COLLECTION_ID:
            errors.append("APPWRITE_COLLECTION_ID is required")
    
    errors.extend(validate_polling(CHECK_INTERVAL, MAX_RESULTS))
    
    if REQUEST_TIMEOUT < 1:
        errors.append("REQUEST_TIMEOUT must be at least 1 second")
    
    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration (safe for logs, no secrets)."""
    print(f"  DEBUG: {DEBUG}")
    print(f"  APPWRITE_ENDPOINT: {APPWRITE_ENDPOINT}")
    print(f"  APPWRITE_PROJECT_ID: {APPWRITE_PROJECT_ID or '(not set)'}")
    print(f"  APPWRITE_API_KEY: {'***' if APPWRITE_API_KEY else '(not set)'}")
    print(f"  APPWRITE_DATABASE_ID: {APPWRITE_DATABASE_ID or '(not set)'}")
    print(f"  APPWRITE_COLLECTION_ID: {APPWRITE_COLLECTION_ID or '(not set)'}")
    print(f"  APPWRITE_TERM_FIELD: {APPWRITE_TERM_FIELD}")
    print(f"  APPWRITE_TRANSLATION_FIELD: {APPWRITE_TRANSLATION_FIELD}")
    print(f"  TWITTER_BEARER_TOKEN: {'***' if TWITTER_BEARER_TOKEN else '(not set)'}")
    print(f"  TWITTER_USER_ID: {TWITTER_USER_ID or '(not set)'}")
    print(f"  TWITTER_USERNAME: @{TWITTER_USERNAME}")
    print(f"  CHECK_INTERVAL: {CHECK_INTERVAL}s")
    print(f"  MAX_RESULTS: {MAX_RESULTS}")
    print(f"  REQUEST_TIMEOUT: {REQUEST_TIMEOUT}s")
    print(f"  LAST_POST_ID_FILE: {LAST_POST_ID_FILE}")
