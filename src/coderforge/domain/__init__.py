"""Domain layer - wire models, host contract and ports."""
