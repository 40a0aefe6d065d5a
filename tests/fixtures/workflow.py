# Workflow Test Fixtures
# Used by test_workflow_*.py

FIXED_PRICE_SCENARIO = {
    "label": "Fixed Price",
    "project": "E-Commerce Website",
    "client": {"name": "John", "email": "john@x.com", "company": "TechCorp"},
    "freelancer": {"name": "Alice", "email": "a@x.com", "skills": "Dev", "rate": 75.0},
    "payment": {"type": "escrow", "amount": 2500.0},
    "milestone": {
        "type": "fixed",
        "title": "Website",
        "description": "desc",
        "amount": 2500.0,
    },
}

HOURLY_SCENARIO = {
    "label": "Hourly",
    "project": "API Integration",
    "client": {"name": "Maria", "email": "maria@shop.io", "company": "ShopCo"},
    "freelancer": {"name": "Bob", "email": "bob@free.io", "skills": "Python", "rate": 60.0},
    "payment": {"type": "direct", "amount": 0.0},
    "milestone": {
        "type": "hourly",
        "title": "REST API",
        "description": "Endpoints and tests",
        "hours": 12.5,
    },
}

NEGATIVE_HOURS_SCENARIO = {
    "label": "Exception Handling",
    "project": "Test Project",
    "client": {"name": "Test Client", "email": "test@test.com", "company": "TestCo"},
    "freelancer": {"name": "Test Freelancer", "email": "test@free.com", "skills": "Testing", "rate": 50.0},
    "payment": {"type": "direct", "amount": 0.0},
    "milestone": {
        "type": "hourly",
        "title": "Test Milestone",
        "description": "Testing exceptions",
        "rate": 50.0,
        "hours": -5.0,
    },
}

ZERO_AMOUNT_SCENARIO = {
    "label": "Zero Amount",
    "project": "Pro Bono",
    "client": {"name": "Eve", "email": "eve@ngo.org", "company": "NGO"},
    "freelancer": {"name": "Carl", "email": "carl@free.io", "skills": "Design", "rate": 40.0},
    "payment": {"type": "escrow", "amount": 0.0},
    "milestone": {
        "type": "fixed",
        "title": "Logo",
        "description": "Volunteer work",
        "amount": 0.0,
    },
}

SAMPLE_CONFIG = {
    "receipts": {"path": "receipts.txt"},
    "demos": [FIXED_PRICE_SCENARIO, NEGATIVE_HOURS_SCENARIO, HOURLY_SCENARIO],
}
