"""CleanCity municipal issue-reporting backend."""
