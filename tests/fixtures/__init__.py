"""
Test fixtures for the rule pipeline.

Contains sample data for testing:
- sample_application.json: A complete, valid loan application
- loan_application_schema.json: Draft 7 schema for loan applications
"""
