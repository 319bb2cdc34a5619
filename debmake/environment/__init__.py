"""Template context construction from manifest and environment snapshots."""
