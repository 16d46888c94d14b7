"""Input validation for CLI arguments."""
import sys

MAX_SECRET_ID_LENGTH = 2048
MAX_VERSION_STAGE_LENGTH = 256


def _fail(message: str, hint: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    print(f"\n{hint}", file=sys.stderr)
    sys.exit(2)


def validate_secret_id(secret_id: str) -> None:
    """
    Validate a secret name or ARN.

    Args:
        secret_id: Secret id to validate

    Raises:
        SystemExit with code 2 if validation fails
    """
    hint = "Secret ids are a secret name or ARN, e.g. prod/db/password or arn:aws:secretsmanager:..."
    if not secret_id:
        _fail("Secret id cannot be empty", hint)

    if len(secret_id) > MAX_SECRET_ID_LENGTH:
        _fail(f"Secret id is longer than {MAX_SECRET_ID_LENGTH} characters", hint)

    if any(ch.isspace() or not ch.isprintable() for ch in secret_id):
        _fail("Secret id cannot contain whitespace or control characters", hint)


def validate_version_stage(stage: str) -> None:
    """
    Validate a version stage label.

    Raises:
        SystemExit with code 2 if validation fails
    """
    hint = "Version stages are labels such as AWSCURRENT, AWSPREVIOUS or AWSPENDING"
    if not stage or not stage.strip():
        _fail("Version stage cannot be empty", hint)

    if len(stage) > MAX_VERSION_STAGE_LENGTH:
        _fail(f"Version stage is longer than {MAX_VERSION_STAGE_LENGTH} characters", hint)
