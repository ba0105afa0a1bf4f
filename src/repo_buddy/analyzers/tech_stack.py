"""Known technology signatures per language.

Each signature maps an import key to a category (framework, library,
database) and a canonical technology name. Go import paths and Rust use
trees are matched by substring; Python modules and JS/TS package
specifiers are matched on their root package so short names such as
"pg" do not fire on unrelated paths.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass(frozen=True)
class TechSignature:
    key: str
    category: str
    name: str


GO_SIGNATURES: tuple[TechSignature, ...] = (
    TechSignature("github.com/gin-gonic/gin", "framework", "Gin"),
    TechSignature("github.com/labstack/echo", "framework", "Echo"),
    TechSignature("github.com/gofiber/fiber", "framework", "Fiber"),
    TechSignature("github.com/gorilla/mux", "framework", "Gorilla Mux"),
    TechSignature("github.com/go-chi/chi", "framework", "Chi"),
    TechSignature("google.golang.org/grpc", "framework", "gRPC"),
    TechSignature("github.com/spf13/cobra", "library", "Cobra"),
    TechSignature("github.com/spf13/viper", "library", "Viper"),
    TechSignature("go.uber.org/zap", "library", "Zap"),
    TechSignature("github.com/sirupsen/logrus", "library", "Logrus"),
    TechSignature("github.com/rs/zerolog", "library", "zerolog"),
    TechSignature("github.com/stretchr/testify", "library", "Testify"),
    TechSignature("github.com/golang/mock", "library", "gomock"),
    TechSignature("go.uber.org/mock", "library", "gomock"),
    TechSignature("github.com/google/wire", "library", "Wire"),
    TechSignature("go.uber.org/fx", "library", "Fx"),
    TechSignature("gorm.io/gorm", "database", "GORM"),
    TechSignature("github.com/jmoiron/sqlx", "database", "sqlx"),
    TechSignature("github.com/jackc/pgx", "database", "pgx"),
    TechSignature("github.com/lib/pq", "database", "pq"),
    TechSignature("github.com/go-sql-driver/mysql", "database", "MySQL"),
    TechSignature("github.com/redis/go-redis", "database", "Redis"),
    TechSignature("github.com/go-redis/redis", "database", "Redis"),
    TechSignature("go.mongodb.org/mongo-driver", "database", "MongoDB"),
    TechSignature("database/sql", "database", "database/sql"),
)

PYTHON_SIGNATURES: tuple[TechSignature, ...] = (
    TechSignature("django", "framework", "Django"),
    TechSignature("flask", "framework", "Flask"),
    TechSignature("fastapi", "framework", "FastAPI"),
    TechSignature("starlette", "framework", "Starlette"),
    TechSignature("tornado", "framework", "Tornado"),
    TechSignature("requests", "library", "Requests"),
    TechSignature("httpx", "library", "HTTPX"),
    TechSignature("aiohttp", "library", "aiohttp"),
    TechSignature("pydantic", "library", "Pydantic"),
    TechSignature("numpy", "library", "NumPy"),
    TechSignature("pandas", "library", "pandas"),
    TechSignature("celery", "library", "Celery"),
    TechSignature("click", "library", "Click"),
    TechSignature("typer", "library", "Typer"),
    TechSignature("rich", "library", "Rich"),
    TechSignature("pytest", "library", "pytest"),
    TechSignature("sqlalchemy", "database", "SQLAlchemy"),
    TechSignature("psycopg2", "database", "psycopg2"),
    TechSignature("psycopg", "database", "psycopg"),
    TechSignature("pymongo", "database", "PyMongo"),
    TechSignature("motor", "database", "Motor"),
    TechSignature("redis", "database", "Redis"),
    TechSignature("peewee", "database", "Peewee"),
    TechSignature("sqlite3", "database", "SQLite"),
)

JS_SIGNATURES: tuple[TechSignature, ...] = (
    TechSignature("react", "framework", "React"),
    TechSignature("next", "framework", "Next.js"),
    TechSignature("vue", "framework", "Vue"),
    TechSignature("svelte", "framework", "Svelte"),
    TechSignature("@angular/", "framework", "Angular"),
    TechSignature("express", "framework", "Express"),
    TechSignature("@nestjs/", "framework", "NestJS"),
    TechSignature("fastify", "framework", "Fastify"),
    TechSignature("koa", "framework", "Koa"),
    TechSignature("axios", "library", "Axios"),
    TechSignature("lodash", "library", "Lodash"),
    TechSignature("rxjs", "library", "RxJS"),
    TechSignature("zod", "library", "Zod"),
    TechSignature("inversify", "library", "InversifyJS"),
    TechSignature("jest", "library", "Jest"),
    TechSignature("mongoose", "database", "Mongoose"),
    TechSignature("@prisma/client", "database", "Prisma"),
    TechSignature("typeorm", "database", "TypeORM"),
    TechSignature("sequelize", "database", "Sequelize"),
    TechSignature("pg", "database", "PostgreSQL (pg)"),
    TechSignature("mysql2", "database", "MySQL"),
    TechSignature("redis", "database", "Redis"),
    TechSignature("ioredis", "database", "Redis"),
)

RUST_SIGNATURES: tuple[TechSignature, ...] = (
    TechSignature("tokio", "library", "Tokio"),
    TechSignature("serde", "library", "Serde"),
    TechSignature("reqwest", "library", "Reqwest"),
    TechSignature("anyhow", "library", "Anyhow"),
    TechSignature("thiserror", "library", "thiserror"),
    TechSignature("clap", "library", "Clap"),
    TechSignature("axum", "framework", "Axum"),
    TechSignature("actix_web", "framework", "Actix-web"),
    TechSignature("rocket", "framework", "Rocket"),
    TechSignature("sqlx", "database", "sqlx"),
    TechSignature("diesel", "database", "Diesel"),
)


def match_substring(text: str, signatures: Sequence[TechSignature]) -> Iterator[TechSignature]:
    """Yield signatures whose key occurs anywhere in text."""
    for signature in signatures:
        if signature.key in text:
            yield signature


def match_package(package: str, signatures: Sequence[TechSignature]) -> Iterator[TechSignature]:
    """Yield signatures whose key names package (keys ending in '/' match a scope)."""
    for signature in signatures:
        if signature.key.endswith("/"):
            if package.startswith(signature.key):
                yield signature
        elif package == signature.key:
            yield signature


def python_root_module(module: str) -> str:
    return module.split(".", 1)[0]


def js_package_name(specifier: str) -> Optional[str]:
    """Package part of a JS module specifier, or None for relative paths.

    >>> js_package_name("@nestjs/common/decorators")
    '@nestjs/common'
    >>> js_package_name("lodash/fp")
    'lodash'
    """
    if not specifier or specifier.startswith((".", "/")):
        return None
    parts = specifier.split("/")
    if specifier.startswith("@") and len(parts) > 1:
        return f"{parts[0]}/{parts[1]}"
    return parts[0]
