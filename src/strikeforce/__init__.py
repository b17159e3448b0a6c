"""strikeforce — in-memory mission ledger with phase gates, squad slots and time-locked rewards."""
