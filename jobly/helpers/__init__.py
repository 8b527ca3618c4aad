"""SQL fragment helpers shared by the repositories."""
