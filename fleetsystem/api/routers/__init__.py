# Route modules, grouped by resource.
