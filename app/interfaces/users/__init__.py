"""Users bounded context — HTTP interface."""
