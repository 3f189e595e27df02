"""Auth bounded context: users and credentials."""
