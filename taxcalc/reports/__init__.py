"""Result rendering."""
