"""API subpackage - HTTP endpoints for quotes and base prices."""
