"""Core wiki components: page model, storage, routing and link rendering."""
