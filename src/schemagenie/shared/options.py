from enum import Enum


class InputType(str, Enum):
    """Kinds of frontend artifact a user can submit."""

    REACT = "react"
    HTML = "html"
    JSON = "json"
    FIGMA = "figma"


class OutputFormat(str, Enum):
    """Schema representation styles the generator can return."""

    PRISMA = "prisma"
    SQL = "sql"
    MONGODB = "mongodb"
    FIREBASE = "firebase"


class DatabaseType(str, Enum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    MONGODB = "mongodb"
    FIREBASE = "firebase"


INPUT_TYPE_LABELS = {
    InputType.REACT: "React",
    InputType.HTML: "HTML",
    InputType.JSON: "JSON",
    InputType.FIGMA: "Figma",
}

OUTPUT_FORMAT_LABELS = {
    OutputFormat.PRISMA: "Prisma Schema",
    OutputFormat.SQL: "SQL DDL",
    OutputFormat.MONGODB: "MongoDB Schema",
    OutputFormat.FIREBASE: "Firebase Rules",
}

DATABASE_TYPE_LABELS = {
    DatabaseType.POSTGRESQL: "PostgreSQL",
    DatabaseType.MYSQL: "MySQL",
    DatabaseType.MONGODB: "MongoDB",
    DatabaseType.FIREBASE: "Firebase",
}
