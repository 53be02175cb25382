"""Account services: validation, credential store, registration, authentication, sessions."""
