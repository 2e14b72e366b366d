"""Session state and the ports the core depends on."""
