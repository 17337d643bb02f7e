"""Core data model: identifiers, patterns, skills, match results and errors."""