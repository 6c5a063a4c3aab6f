"""
Configuration module.

Handles environment variables, API credentials, and polling settings.
"""

from eitangos.config.config import (
    DEBUG,
    APPWRITE_ENDPOINT,
    APPWRITE_PROJECT_ID,
    APPWRITE_API_KEY,
    APPWRITE_DATABASE_ID,
    APPWRITE_COLLECTION_ID,
    APPWRITE_TERM_FIELD,
    APPWRITE_TRANSLATION_FIELD,
    TWITTER_BEARER_TOKEN,
    TWITTER_USER_ID,
    TWITTER_USERNAME,
    CHECK_INTERVAL,
    MAX_CHECK_INTERVAL,
    MAX_RESULTS,
    REQUEST_TIMEOUT,
    LAST_POST_ID_FILE,
    validate_polling,
    validate_config,
    print_config_summary,
)

__all__ = [
    "DEBUG",
    "APPWRITE_ENDPOINT",
    "APPWRITE_PROJECT_ID",
    "APPWRITE_API_KEY",
    "APPWRITE_DATABASE_ID",
    "APPWRITE_COLLECTION_ID",
    "APPWRITE_TERM_FIELD",
    "APPWRITE_TRANSLATION_FIELD",
    "TWITTER_BEARER_TOKEN",
    "TWITTER_USER_ID",
    "TWITTER_USERNAME",
    "CHECK_INTERVAL",
    "MAX_CHECK_INTERVAL",
    "MAX_RESULTS",
    "REQUEST_TIMEOUT",
    "LAST_POST_ID_FILE",
    "validate_polling",
    "validate_config",
    "print_config_summary",
]
