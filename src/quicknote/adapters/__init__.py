"""Host UI adapters."""
