"""FireProtect backend: sensor gateway, alert evaluation and dashboard API."""
