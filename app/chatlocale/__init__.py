"""Localization and branding core for the chat client."""
