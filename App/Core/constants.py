"""Shared constants for the account registry."""

# Environment used whenever a caller does not name one.
DEFAULT_ENVIRONMENT = "Test"

# Name of the notification posted when an account is selected.
ACCOUNT_SELECTED = "TestAccountSelected"
