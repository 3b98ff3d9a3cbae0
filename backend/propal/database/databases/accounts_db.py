"""
Accounts database configuration.
Stores user identity, profile and agent configuration data.
"""


class Collections:
    """Collection names in the accounts database."""
    ACCOUNTS = "accounts"


class Fields:
    """Document field names in the accounts collection."""
    ID = "_id"
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    PHONE_NUMBER = "phoneNumber"
    CREATED_AT = "createdAt"
    AGENT_CONFIG = "agentConfig"
    PASSWORD_RESET = "passwordReset"


# Read shapes: fields never returned to callers outside authentication
PROFILE_PROJECTION = {Fields.PASSWORD: 0, Fields.PASSWORD_RESET: 0}
AGENT_CONFIG_PROJECTION = {Fields.AGENT_CONFIG: 1}

# Unique indexes backing the username/email invariants
INDEXES = [
    {"keys": Fields.USERNAME, "unique": True, "name": "username_unique"},
    {"keys": Fields.EMAIL, "unique": True, "name": "email_unique"},
    {
        "keys": f"{Fields.PASSWORD_RESET}.tokenHash",
        "sparse": True,
        "name": "password_reset_token",
    },
]
