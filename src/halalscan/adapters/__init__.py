"""Source adapters that turn upstream payloads into ProductRecords."""
