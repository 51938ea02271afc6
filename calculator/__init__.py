"""Web front end for the negative test calculator."""
