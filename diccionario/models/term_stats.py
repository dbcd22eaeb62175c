from ..extensions import db
from ..utils.timezone_utils import TimezoneUtils


class TermStats(db.Model):
    """Per-term usage counters, one row per term."""

    __tablename__ = 'term_stats'

    id = db.Column(db.Integer, primary_key=True)
    term_id = db.Column(db.Integer, db.ForeignKey('term.id', ondelete='CASCADE'), nullable=False, unique=True)
    views = db.Column(db.Integer, nullable=False, default=0)
    context_hits = db.Column(db.JSON, nullable=False, default=dict)
    language_hits = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime, default=TimezoneUtils.utc_now)

    term = db.relationship('Term', backref=db.backref('stats', uselist=False, cascade='all, delete-orphan'))
