"""Static skill vocabulary, interest keywords and canonicalization.

Tokens are stored in their display form and escaped when compiled, so
"C++" and "Node.js" need no hand-written regex. The tables and compiled
patterns are built once at import and never mutated.
"""

import logging
import re

from rapidfuzz import fuzz, process

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Token tables
# ---------------------------------------------------------------------------
PROGRAMMING_LANGUAGES: tuple[str, ...] = (
    "JavaScript", "TypeScript", "Python", "Go", "Golang", "Rust", "Java", "Ruby",
    "PHP", "C++", "C#", "Swift", "Kotlin", "Scala", "Dart", "Elixir",
    "Haskell", "Clojure", "R", "MATLAB", "Julia", "Perl", "Lua", "Shell",
    "Bash", "PowerShell", "SQL", "HTML", "CSS", "SASS", "SCSS", "Solidity",
)

FRAMEWORKS_LIBRARIES: tuple[str, ...] = (
    "React", "React.js", "ReactJS", "Vue", "Vue.js", "VueJS", "Angular",
    "Next.js", "NextJS", "Nuxt", "Svelte", "SvelteKit", "Remix",
    "Node.js", "NodeJS", "Express", "Express.js", "Fastify", "NestJS", "Koa",
    "Django", "Flask", "FastAPI", "Spring", "Spring Boot", "Rails", "Ruby on Rails",
    "Laravel", "Symfony", "ASP.NET", ".NET Core", "Gin", "Echo", "Fiber",
    "TensorFlow", "PyTorch", "Keras", "Scikit-learn", "Pandas", "NumPy",
    "jQuery", "Bootstrap", "Tailwind", "TailwindCSS", "Material UI", "Chakra UI",
    "Redux", "MobX", "Zustand", "Recoil", "GraphQL", "Apollo", "tRPC",
    "Prisma", "Drizzle", "Sequelize", "TypeORM", "Mongoose",
)

DEVOPS_TOOLS: tuple[str, ...] = (
    "Docker", "Kubernetes", "K8s", "Helm", "Terraform", "Ansible", "Puppet", "Chef",
    "AWS", "Amazon Web Services", "GCP", "Google Cloud", "Azure", "DigitalOcean",
    "Vercel", "Netlify", "Heroku", "Railway", "Fly.io",
    "Jenkins", "GitHub Actions", "GitLab CI", "CircleCI", "Travis CI",
    "Nginx", "Apache", "Caddy", "HAProxy",
    "Prometheus", "Grafana", "Datadog", "New Relic", "Sentry",
    "Linux", "Ubuntu", "CentOS", "Debian", "RHEL",
)

DATABASES: tuple[str, ...] = (
    "PostgreSQL", "Postgres", "MySQL", "MariaDB", "SQLite", "Oracle", "SQL Server",
    "MongoDB", "Redis", "Elasticsearch", "Cassandra", "DynamoDB", "CouchDB",
    "Neo4j", "InfluxDB", "TimescaleDB", "Supabase", "Firebase", "PlanetScale",
    "Firestore", "Fauna", "CockroachDB",
)

TECHNOLOGY_TABLES: tuple[tuple[str, ...], ...] = (FRAMEWORKS_LIBRARIES, DEVOPS_TOOLS, DATABASES)

# ---------------------------------------------------------------------------
# Interest categories: closed vocabulary -> substring keywords
# ---------------------------------------------------------------------------
INTEREST_KEYWORDS: dict[str, tuple[str, ...]] = {
    "web": ("web development", "frontend", "backend", "full stack", "fullstack", "web app", "website"),
    "mobile": ("mobile", "android", "ios", "react native", "flutter", "swift", "kotlin"),
    "machine-learning": (
        "machine learning", "ml", "deep learning", "neural network", "ai",
        "artificial intelligence", "nlp", "computer vision",
    ),
    "devops": ("devops", "ci/cd", "infrastructure", "cloud", "sre", "site reliability"),
    "security": ("security", "cybersecurity", "infosec", "penetration testing", "ethical hacking"),
    "blockchain": ("blockchain", "web3", "smart contract", "solidity", "ethereum", "defi", "nft"),
    "database": ("database", "data engineering", "data pipeline", "etl", "data warehouse"),
    "api": ("api", "rest", "graphql", "microservices", "backend"),
    "frontend": ("frontend", "ui", "ux", "user interface", "user experience", "css", "design system"),
    "backend": ("backend", "server", "api", "database", "microservice"),
    "testing": ("testing", "qa", "quality assurance", "test automation", "unit test", "e2e"),
    "documentation": ("documentation", "technical writing", "docs"),
    "cli": ("cli", "command line", "terminal", "shell script"),
}

INTERESTS: frozenset[str] = frozenset(INTEREST_KEYWORDS)

# ---------------------------------------------------------------------------
# Canonicalization: lower-case alias -> display form
# Vocabulary tokens map to themselves; aliases override.
# ---------------------------------------------------------------------------
SKILL_ALIASES: dict[str, str] = {
    # Languages
    "golang": "Go",
    "c plus plus": "C++", "cpp": "C++",
    "c sharp": "C#", "csharp": "C#",
    "js": "JavaScript", "ts": "TypeScript",
    "sass": "Sass",
    # Frontend
    "react.js": "React", "reactjs": "React",
    "vue.js": "Vue", "vuejs": "Vue",
    "nextjs": "Next.js",
    "tailwind": "Tailwind CSS", "tailwindcss": "Tailwind CSS",
    # Backend
    "nodejs": "Node.js", "node": "Node.js",
    "express.js": "Express", "expressjs": "Express",
    "ruby on rails": "Rails",
    "scikit-learn": "scikit-learn", "sklearn": "scikit-learn",
    # Cloud & DevOps
    "k8s": "Kubernetes",
    "amazon web services": "AWS",
    "google cloud": "GCP", "google cloud platform": "GCP",
    # Databases
    "postgres": "PostgreSQL", "postgre sql": "PostgreSQL",
}

# Minimum similarity (0-100) for fuzzy resolution of AI-supplied tokens
FUZZY_THRESHOLD = 90


def _build_canonical_map() -> dict[str, str]:
    canonical: dict[str, str] = {}
    for table in (PROGRAMMING_LANGUAGES, *TECHNOLOGY_TABLES):
        for token in table:
            canonical.setdefault(token.lower(), token)
    canonical.update(SKILL_ALIASES)
    return canonical


CANONICAL_FORMS: dict[str, str] = _build_canonical_map()

LANGUAGE_NAMES: frozenset[str] = frozenset(
    CANONICAL_FORMS[token.lower()] for token in PROGRAMMING_LANGUAGES
)

TECHNOLOGY_NAMES: frozenset[str] = frozenset(CANONICAL_FORMS.values()) - LANGUAGE_NAMES

# Display forms that fuzzy resolution may snap to
_KNOWN_DISPLAY_FORMS: tuple[str, ...] = tuple(sorted(set(CANONICAL_FORMS.values())))


def canonicalize(token: str) -> str:
    """Resolve a token to its display form.

    Case-insensitive. Unknown tokens come back trimmed but otherwise unchanged.
    """
    if not isinstance(token, str):
        return ""
    stripped = re.sub(r"\s+", " ", token.strip())
    return CANONICAL_FORMS.get(stripped.lower(), stripped)


def resolve_token(token: str) -> str:
    """Canonicalize a free-form token, with fuzzy fallback for near-misses.

    Used for model output, where "Postgre SQL" or "Type Script" show up.
    Short tokens are never fuzzy matched.
    """
    canonical = canonicalize(token)
    if canonical.lower() in CANONICAL_FORMS or len(canonical) < 4:
        return canonical

    match = process.extractOne(
        canonical.lower(),
        _KNOWN_DISPLAY_FORMS,
        scorer=fuzz.ratio,
        processor=str.lower,
        score_cutoff=FUZZY_THRESHOLD,
    )
    if match is None:
        return canonical
    logger.debug("Fuzzy resolved %r -> %r (%.1f)", canonical, match[0], match[1])
    return match[0]


def is_known_language(token: str) -> bool:
    return canonicalize(token) in LANGUAGE_NAMES


def is_known_technology(token: str) -> bool:
    """True for vocabulary tokens that are not programming languages."""
    return canonicalize(token) in TECHNOLOGY_NAMES


def compile_token(token: str) -> re.Pattern:
    # Alphanumeric lookarounds instead of \b so "C++" and ".NET Core" match at
    # boundaries and "Java" stays out of "JavaScript"
    return re.compile(
        rf"(?<![A-Za-z0-9_]){re.escape(token)}(?![A-Za-z0-9_])",
        re.IGNORECASE,
    )


LANGUAGE_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (token, compile_token(token)) for token in PROGRAMMING_LANGUAGES
)

TECHNOLOGY_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (token, compile_token(token)) for table in TECHNOLOGY_TABLES for token in table
)
