"""Desktop configurator app for the procedural Christmas tree."""
