"""Token-conscious querying: token budgets, delta queries and pagination."""