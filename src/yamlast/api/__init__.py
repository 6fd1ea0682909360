"""REST API for yamlast."""
