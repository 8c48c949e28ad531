"""Sample-data seeder for the catalog database."""
