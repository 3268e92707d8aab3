"""SQLAlchemy table definitions for board voting.

Users live in the identity provider, so user columns are plain UUIDs
without foreign keys.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# BOARDS TABLE
# ============================================================================
boards_table = Table(
    "boards",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", String(200), nullable=False),
    Column("description", String(1000), nullable=False, server_default=""),
    Column("created_by", UUID, nullable=False),
    Column("suggestions_open", Boolean, nullable=False, server_default="true"),
    Column("voting_open", Boolean, nullable=False, server_default="true"),
    Column("closed", Boolean, nullable=False, server_default="false"),
    Column("require_approval", Boolean, nullable=False, server_default="false"),
    Column(
        "voting_type",
        Enum("single", "multiple", name="voting_type"),
        nullable=False,
        server_default="single",
    ),
    Column("max_votes", Integer, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("max_votes IS NULL OR max_votes > 0", name="max_votes_positive"),
)

Index("idx_boards_created_at", boards_table.c.created_at.desc())

# ============================================================================
# SUGGESTIONS TABLE
# ============================================================================
suggestions_table = Table(
    "suggestions",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "board_id", UUID, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", Text, nullable=False),
    Column("submitted_by", UUID, nullable=False),
    Column(
        "status",
        Enum("pending", "approved", "rejected", name="suggestion_status"),
        nullable=False,
        server_default="pending",
    ),
    Column("visible", Boolean, nullable=False, server_default="false"),
    Column(
        "submitted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status <> 'rejected' OR visible = false", name="rejected_never_visible"
    ),
)

Index(
    "idx_suggestions_board_submitted",
    suggestions_table.c.board_id,
    suggestions_table.c.submitted_at,
)
Index("idx_suggestions_status", suggestions_table.c.status)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "suggestion_id",
        UUID,
        ForeignKey("suggestions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Denormalized from suggestions so per-board counts need no join
    Column(
        "board_id", UUID, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One vote per user per suggestion; the last line of defence against races
    UniqueConstraint("suggestion_id", "user_id", name="uq_vote_suggestion_user"),
)

Index("idx_votes_board_user", votes_table.c.board_id, votes_table.c.user_id)
Index("idx_votes_suggestion_id", votes_table.c.suggestion_id)
