"""Create students table."""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261018_create_students"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "students",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("userName", sa.String(50), nullable=True),
        sa.Column("sid", sa.String(10), nullable=True),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("department", sa.String(100), nullable=True),
        sa.Column("grade", sa.String(20), nullable=True),
        sa.Column("class", sa.String(20), nullable=True),
        sa.Column("Email", sa.String(100), nullable=True),
        sa.Column("absences", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade():
    op.drop_table("students")
