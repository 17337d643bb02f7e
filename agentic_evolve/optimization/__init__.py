"""Pattern storage optimization and match-result caching."""