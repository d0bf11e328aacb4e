"""Testing utilities – in-memory fakes for the store port."""
