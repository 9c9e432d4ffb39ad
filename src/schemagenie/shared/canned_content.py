"""Canned generation output.

The generator does not analyse submitted code yet. Until an inference engine
exists, every response is assembled from the constants below, selected only
by the requested output format.
"""
from typing import Dict

from schemagenie.shared.errors import ValidationError
from schemagenie.shared.options import OutputFormat

PRISMA_SCHEMA = """generator client {
  provider = "prisma-client-js"
}

datasource db {
  provider = "postgresql"
  url      = env("DATABASE_URL")
}

model User {
  id        String   @id @default(cuid())
  email     String   @unique
  name      String?
  createdAt DateTime @default(now())
  updatedAt DateTime @updatedAt
  posts     Post[]
  profile   Profile?
}

model Profile {
  id     String  @id @default(cuid())
  bio    String?
  avatar String?
  userId String  @unique
  user   User    @relation(fields: [userId], references: [id])
}

model Post {
  id        String   @id @default(cuid())
  title     String
  content   String?
  published Boolean  @default(false)
  authorId  String
  author    User     @relation(fields: [authorId], references: [id])
  createdAt DateTime @default(now())
  updatedAt DateTime @updatedAt
}"""

SQL_SCHEMA = """CREATE TABLE users (
  id SERIAL PRIMARY KEY,
  email VARCHAR(255) UNIQUE NOT NULL,
  name VARCHAR(255),
  created_at TIMESTAMP DEFAULT NOW(),
  updated_at TIMESTAMP DEFAULT NOW()
);

CREATE TABLE profiles (
  id SERIAL PRIMARY KEY,
  bio TEXT,
  avatar VARCHAR(255),
  user_id INTEGER UNIQUE REFERENCES users(id) ON DELETE CASCADE
);

CREATE TABLE posts (
  id SERIAL PRIMARY KEY,
  title VARCHAR(255) NOT NULL,
  content TEXT,
  published BOOLEAN DEFAULT false,
  author_id INTEGER REFERENCES users(id) ON DELETE CASCADE,
  created_at TIMESTAMP DEFAULT NOW(),
  updated_at TIMESTAMP DEFAULT NOW()
);"""

MONGODB_SCHEMA = """{
  "users": {
    "_id": "ObjectId",
    "email": "String (unique, required)",
    "name": "String (optional)",
    "profile": {
      "bio": "String (optional)",
      "avatar": "String (optional)"
    },
    "createdAt": "Date",
    "updatedAt": "Date"
  },
  "posts": {
    "_id": "ObjectId",
    "title": "String (required)",
    "content": "String (optional)",
    "published": "Boolean (default: false)",
    "authorId": "ObjectId (ref: users._id)",
    "createdAt": "Date",
    "updatedAt": "Date"
  }
}"""

FIREBASE_SCHEMA = """{
  "users": {
    "rules": {
      "$uid": {
        ".read": "$uid === auth.uid",
        ".write": "$uid === auth.uid",
        ".validate": "newData.hasChildren(['email', 'createdAt'])"
      }
    },
    "structure": {
      "email": "string",
      "name": "string",
      "profile": {
        "bio": "string",
        "avatar": "string"
      },
      "createdAt": "timestamp",
      "updatedAt": "timestamp"
    }
  },
  "posts": {
    "rules": {
      ".read": true,
      "$postId": {
        ".write": "auth != null && auth.uid == data.child('authorId').val()"
      }
    },
    "structure": {
      "title": "string",
      "content": "string",
      "published": "boolean",
      "authorId": "string",
      "createdAt": "timestamp",
      "updatedAt": "timestamp"
    }
  }
}"""

CANNED_SCHEMAS: Dict[OutputFormat, str] = {
    OutputFormat.PRISMA: PRISMA_SCHEMA,
    OutputFormat.SQL: SQL_SCHEMA,
    OutputFormat.MONGODB: MONGODB_SCHEMA,
    OutputFormat.FIREBASE: FIREBASE_SCHEMA,
}

CANNED_API_ROUTES = """// User Routes
POST   /api/users                 - Create user
GET    /api/users/:id             - Get user by ID
PUT    /api/users/:id             - Update user
DELETE /api/users/:id             - Delete user
GET    /api/users/:id/profile     - Get user profile

// Post Routes
GET    /api/posts                 - Get all posts
POST   /api/posts                 - Create post
GET    /api/posts/:id             - Get post by ID
PUT    /api/posts/:id             - Update post
DELETE /api/posts/:id             - Delete post
GET    /api/posts/user/:userId    - Get posts by user

// Authentication
POST   /api/auth/login            - User login
POST   /api/auth/logout           - User logout
POST   /api/auth/register         - User registration
GET    /api/auth/me               - Get current user"""

CANNED_EXPLANATION = """Based on your frontend code analysis, I've identified the following data relationships and designed an optimal schema:

**Key Entities Identified:**
- **User**: Core entity representing app users with authentication
- **Profile**: Extended user information with bio and avatar
- **Post**: Content created by users with publishing status

**Design Decisions:**
1. **Normalized Structure**: Separated profile from user table to reduce data redundancy
2. **Foreign Key Relationships**: Established proper relationships between users and posts
3. **Indexing Strategy**: Email uniqueness constraint for authentication
4. **Timestamps**: Added created/updated timestamps for audit trail
5. **Soft Dependencies**: Profile is optional, allowing flexible user onboarding

**Performance Considerations:**
- Email field indexed for fast login queries
- Author relationship indexed for efficient post retrieval
- Optional fields allow for gradual data collection

This schema supports scalability while maintaining data integrity and query performance."""


def get_canned_schema(output_format: OutputFormat) -> str:
    """Return the schema text for ``output_format``.

    Raises:
        ValidationError: if ``output_format`` is not an ``OutputFormat`` member.
    """
    try:
        return CANNED_SCHEMAS[OutputFormat(output_format)]
    except (KeyError, ValueError) as e:
        raise ValidationError(f"Unsupported output format: {output_format!r}") from e
