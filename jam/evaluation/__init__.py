"""Strategy-parameterized evaluation of Jam ASTs."""
