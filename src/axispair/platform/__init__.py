"""Infrastructure helpers shared by axispair modules."""
