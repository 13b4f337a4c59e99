# kbqa/bank/question_bank.py
# Built-in seed corpus for the internal knowledge base. Used when no seed file is configured.

SEED_QUESTIONS = [
    {
        "id": 1,
        "title": "How to add certificates to Java?",
        "body": "I need to add SSL certificates to my Java application. What's the correct process?",
        "author": "New Java Dev",
        "upvotes": 120,
        "downvotes": 0,
        "tags": ["java", "ssl", "security"],
        "answers": [
            {
                "id": 1,
                "body": (
                    "Use the keytool command to import the certificate into your Java keystore:\n\n"
                    "1. First, locate your Java keystore (typically in $JAVA_HOME/lib/security/cacerts)\n"
                    "2. Run the command:\n"
                    "   keytool -importcert -alias mycert -file certificate.crt -keystore cacerts -storepass changeit\n\n"
                    "Note: The default keystore password is 'changeit'"
                ),
                "upvotes": 45,
                "downvotes": 2,
                "author": "Java Security Expert",
            },
            {
                "id": 2,
                "body": (
                    "For programmatic approach:\n\n"
                    "```java\n"
                    "System.setProperty(\"javax.net.ssl.trustStore\", \"/path/to/keystore\");\n"
                    "System.setProperty(\"javax.net.ssl.trustStorePassword\", \"password\");\n"
                    "```\n\n"
                    "Add this before making any SSL connections."
                ),
                "upvotes": 32,
                "downvotes": 1,
                "author": "Senior Developer",
            },
            {
                "id": 3,
                "body": (
                    "If you're using Spring Boot, add these to application.properties:\n\n"
                    "server.ssl.key-store=classpath:keystore.jks\n"
                    "server.ssl.key-store-password=password\n"
                    "server.ssl.key-store-type=JKS\n"
                    "server.ssl.key-alias=tomcat"
                ),
                "upvotes": 28,
                "downvotes": 0,
                "author": "Spring Expert",
            },
        ],
    },
    {
        "id": 2,
        "title": "How do I set up my development environment?",
        "body": "I'm new to the team and need help setting up my local development environment. What are the steps?",
        "author": "Sarah Johnson",
        "upvotes": 45,
        "downvotes": 0,
        "tags": ["onboarding", "tooling"],
        "answers": [
            {
                "id": 4,
                "body": (
                    "1. Install Node.js (v18 or higher)\n"
                    "2. Clone the repository: git clone https://github.com/company/project\n"
                    "3. Run npm install\n"
                    "4. Copy .env.example to .env and update values\n"
                    "5. Run npm run dev\n"
                    "6. Install Docker for local services\n"
                    "7. Run docker-compose up -d"
                ),
                "upvotes": 25,
                "downvotes": 1,
                "author": "Alex Chen",
            },
            {
                "id": 5,
                "body": (
                    "For Windows users:\n"
                    "1. Install WSL2\n"
                    "2. Install Ubuntu from Microsoft Store\n"
                    "3. Follow Linux setup guide\n"
                    "4. Configure VS Code Remote WSL extension"
                ),
                "upvotes": 18,
                "downvotes": 0,
                "author": "Windows Expert",
            },
        ],
    },
    {
        "id": 3,
        "title": "What's the process for deploying to production?",
        "body": "Need to understand the deployment process for pushing changes to production.",
        "author": "David Lee",
        "upvotes": 52,
        "downvotes": 1,
        "tags": ["deployment", "ci"],
        "answers": [
            {
                "id": 6,
                "body": (
                    "1. Create a PR to main branch\n"
                    "2. Get 2 approvals from senior devs\n"
                    "3. Ensure all tests pass (npm run test)\n"
                    "4. Update changelog.md\n"
                    "5. Merge PR\n"
                    "6. CI/CD will:\n"
                    "   - Run tests\n"
                    "   - Build Docker image\n"
                    "   - Deploy to staging\n"
                    "   - Run E2E tests\n"
                    "   - Deploy to production\n"
                    "7. Monitor metrics for 1 hour"
                ),
                "upvotes": 32,
                "downvotes": 0,
                "author": "Mike Wilson",
            },
            {
                "id": 7,
                "body": (
                    "Common gotchas to watch for:\n"
                    "1. Always check ENV variables in staging\n"
                    "2. Verify DB migrations work\n"
                    "3. Check CDN cache settings\n"
                    "4. Monitor error rates post-deploy"
                ),
                "upvotes": 28,
                "downvotes": 1,
                "author": "DevOps Lead",
            },
        ],
    },
    {
        "id": 4,
        "title": "How to handle database migrations in production?",
        "body": "What's the safest way to apply database migrations in production without downtime?",
        "author": "Backend Dev",
        "upvotes": 88,
        "downvotes": 1,
        "tags": ["database", "deployment"],
        "answers": [
            {
                "id": 8,
                "body": (
                    "Zero-downtime migration process:\n\n"
                    "1. Always make backward-compatible changes\n"
                    "2. Follow these steps:\n"
                    "   - Add new column (nullable)\n"
                    "   - Deploy code that writes to both old and new\n"
                    "   - Migrate data\n"
                    "   - Deploy code that reads from new\n"
                    "   - Remove old column\n\n"
                    "Never modify existing columns directly!"
                ),
                "upvotes": 42,
                "downvotes": 0,
                "author": "Database Admin",
            },
            {
                "id": 9,
                "body": (
                    "Use tools like Flyway or Liquibase to manage migrations:\n\n"
                    "```sql\n"
                    "-- Example Flyway migration\n"
                    "CREATE TABLE users_new AS SELECT * FROM users;\n"
                    "ALTER TABLE users_new ADD COLUMN email VARCHAR(255);\n"
                    "-- Copy data\n"
                    "DROP TABLE users;\n"
                    "ALTER TABLE users_new RENAME TO users;\n"
                    "```"
                ),
                "upvotes": 35,
                "downvotes": 2,
                "author": "Senior DBA",
            },
        ],
    },
    {
        "id": 5,
        "title": "Best practices for API error handling?",
        "body": "What's the recommended way to handle and return API errors to clients?",
        "author": "API Developer",
        "upvotes": 95,
        "downvotes": 2,
        "tags": ["api", "errors"],
        "answers": [
            {
                "id": 10,
                "body": (
                    "Standard error response format:\n\n"
                    "```json\n"
                    "{\n"
                    "  \"error\": {\n"
                    "    \"code\": \"VALIDATION_ERROR\",\n"
                    "    \"message\": \"Invalid input\",\n"
                    "    \"details\": [{\n"
                    "      \"field\": \"email\",\n"
                    "      \"message\": \"Must be valid email\"\n"
                    "    }]\n"
                    "  }\n"
                    "}\n"
                    "```\n\n"
                    "Use appropriate HTTP status codes:\n"
                    "- 400: Bad Request\n"
                    "- 401: Unauthorized\n"
                    "- 403: Forbidden\n"
                    "- 404: Not Found\n"
                    "- 422: Unprocessable Entity\n"
                    "- 429: Too Many Requests\n"
                    "- 500: Internal Server Error"
                ),
                "upvotes": 56,
                "downvotes": 1,
                "author": "API Designer",
            },
            {
                "id": 11,
                "body": (
                    "Error handling middleware example:\n\n"
                    "```typescript\n"
                    "app.use((err, req, res, next) => {\n"
                    "  if (err instanceof ValidationError) {\n"
                    "    return res.status(400).json({\n"
                    "      error: {\n"
                    "        code: 'VALIDATION_ERROR',\n"
                    "        message: err.message,\n"
                    "        details: err.details\n"
                    "      }\n"
                    "    });\n"
                    "  }\n"
                    "  // Log error to monitoring service\n"
                    "  logger.error(err);\n"
                    "  res.status(500).json({\n"
                    "    error: {\n"
                    "      code: 'INTERNAL_ERROR',\n"
                    "      message: 'An unexpected error occurred'\n"
                    "    }\n"
                    "  });\n"
                    "});\n"
                    "```"
                ),
                "upvotes": 48,
                "downvotes": 0,
                "author": "Backend Lead",
            },
        ],
    },
]
