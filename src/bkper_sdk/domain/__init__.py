"""Domain layer: value objects, balance tree, ports and exceptions."""
