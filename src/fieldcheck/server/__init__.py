"""HTTP surface: validation endpoint and rule management API."""
