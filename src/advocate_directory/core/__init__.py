"""Core primitives: column registry, query builder, ORM, repositories, errors, logging."""
