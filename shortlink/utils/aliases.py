import secrets

from pydantic import HttpUrl, TypeAdapter, ValidationError

from shortlink.core.exceptions import InvalidLength, InvalidTarget, ReservedAlias

# Base62 alphabet, case-sensitive
ALPHABET = "1234567890abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALIAS_LENGTH = 6

CUSTOM_ALIAS_MIN_LENGTH = 3
CUSTOM_ALIAS_MAX_LENGTH = 20

# Collides with the service's own /api routes
RESERVED_ALIAS = "api"

# http/https only, same host and port rules as a browser URL parser
_target_adapter = TypeAdapter(HttpUrl)


def generate_alias() -> str:
    """Generate a random 6-character Base62 alias. Uniqueness is not checked."""
    return ''.join(secrets.choice(ALPHABET) for _ in range(ALIAS_LENGTH))


def validate_custom_alias(alias: str) -> str:
    """Check length bounds, then the reserved word. Any characters are allowed."""
    if not CUSTOM_ALIAS_MIN_LENGTH <= len(alias) <= CUSTOM_ALIAS_MAX_LENGTH:
        raise InvalidLength()
    if alias == RESERVED_ALIAS:
        raise ReservedAlias(f"Custom alias '{alias}' is reserved")
    return alias


def validate_target(target) -> str:
    """Accept only absolute http(s) URLs; the string is returned untouched."""
    if not target or not isinstance(target, str):
        raise InvalidTarget()
    try:
        _target_adapter.validate_python(target)
    except ValidationError:
        raise InvalidTarget()
    return target
