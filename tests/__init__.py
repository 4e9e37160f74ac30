"""Test package. Provides settings the app requires before any app module is imported."""

import os

os.environ.setdefault("JWT_SECRET", "test-signing-secret-0123456789abcdef-not-for-prod")
os.environ.setdefault("APP_ENV", "dev")
