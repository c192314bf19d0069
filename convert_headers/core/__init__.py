"""Header translation core: tables, translator, logging and errors."""
