"""Strongly typed identifiers for guestbook entities."""

from typing import NewType

# Surrogate key assigned by storage on first save
IdentityId = NewType("IdentityId", int)

# Provider name an app credential is stored under, e.g. "google"
ProviderName = NewType("ProviderName", str)
