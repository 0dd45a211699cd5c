"""REST service for Cliente records and their Endereco records."""
