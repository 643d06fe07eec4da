"""Foundation: configuration and testing support."""
