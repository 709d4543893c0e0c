"""Employee directory: CRUD, search and spreadsheet import."""
