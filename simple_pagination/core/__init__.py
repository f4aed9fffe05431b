"""Core pagination primitives: normalization, page results, errors, config."""
