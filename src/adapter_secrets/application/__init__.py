"""Application layer – secret resolution and keyed signing."""
