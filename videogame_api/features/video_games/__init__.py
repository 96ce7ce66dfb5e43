"""Video game CRUD use cases."""
