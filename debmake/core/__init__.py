"""Domain models, errors and settings shared across debmake."""
