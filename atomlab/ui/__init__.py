"""pygame front end for the atom sandbox."""
