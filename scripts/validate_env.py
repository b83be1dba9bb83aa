#!/usr/bin/env python3
"""Validate environment configuration before startup."""
import os
import sys


def validate():
    """Validate all required environment variables."""
    errors = []
    warnings = []

    # Required variables
    required = [
        ("DATABASE_URL", "Database connection URL"),
        ("JWT_SECRET", "JWT secret key"),
    ]

    for var, description in required:
        if not os.getenv(var):
            errors.append(f"Missing required: {var} ({description})")

    # Check database
    database_url = os.getenv("DATABASE_URL", "")
    if database_url.startswith("sqlite"):
        warnings.append("DATABASE_URL points at SQLite - use PostgreSQL in production")
    if ":wedding@" in database_url:
        warnings.append("Database password is set to default value - change for production")

    # Check JWT secret strength
    jwt_secret = os.getenv("JWT_SECRET", "")
    if jwt_secret and len(jwt_secret) < 32:
        warnings.append("JWT_SECRET should be at least 32 characters")
    if jwt_secret and "change" in jwt_secret.lower():
        warnings.append("JWT_SECRET appears to be a placeholder - generate a real secret")

    # Music request quota
    limit = os.getenv("MAX_MUSIC_REQUESTS_PER_USER")
    if limit is not None:
        if not limit.isdigit():
            errors.append(f"MAX_MUSIC_REQUESTS_PER_USER must be a non-negative integer: {limit}")
        elif int(limit) == 0:
            warnings.append("MAX_MUSIC_REQUESTS_PER_USER is 0 - guests cannot request music")

    if os.getenv("ENV", "dev") != "prod":
        warnings.append("ENV is not 'prod' - internal errors will be shown to clients")

    if os.getenv("CORS_ORIGINS", "*") == "*":
        warnings.append("CORS_ORIGINS allows any origin")

    # Report results
    print("=" * 60)
    print("Wedding Environment Validation")
    print("=" * 60)

    if errors:
        print("\nERRORS:")
        for error in errors:
            print(f"  [X] {error}")

    if warnings:
        print("\nWARNINGS:")
        for warning in warnings:
            print(f"  [!] {warning}")

    if not errors and not warnings:
        print("\n  All checks passed.")

    print("\n" + "=" * 60)

    if errors:
        print("RESULT: Configuration INVALID - fix errors before starting")
        sys.exit(1)

    if warnings:
        print("RESULT: Configuration valid with warnings")
    else:
        print("RESULT: Configuration valid")

    sys.exit(0)


if __name__ == "__main__":
    validate()
