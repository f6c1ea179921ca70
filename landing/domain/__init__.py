"""Domain records and rules, independent of storage and web layers."""
