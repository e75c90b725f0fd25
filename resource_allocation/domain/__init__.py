"""Domain layer: records, rules and the pure validation core."""
