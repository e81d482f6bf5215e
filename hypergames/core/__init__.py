"""Core building blocks: profiles, strategies, evaluation structures and registries."""
