"""Assignment hub: one prioritized work list per user across all item sources."""
