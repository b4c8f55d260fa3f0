"""HTTP routes for Meeting Desk."""
