"""Sample entity classes used by the tests."""
