"""Clubhouse: member sign-up, log-in and log-out over signed session cookies."""
