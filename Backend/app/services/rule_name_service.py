# Backend/app/services/rule_name_service.py

import json
import re

from sqlalchemy import or_

from Backend.app.exceptions import BusinessRuleError
from Backend.app.models.reference_models import RuleName
from Backend.app.services.base import CrudService

RULE_NAME_PATTERN = re.compile(r'^[a-zA-Z0-9][a-zA-Z0-9_\-.]*$')
# DML/DDL statement shapes and comment / extended-procedure markers
DANGEROUS_SQL_PATTERN = re.compile(
    r'(\b(ALTER|CREATE|DELETE|DROP|EXEC(UTE)?|INSERT|SELECT|UNION|UPDATE)\b.*'
    r'\b(FROM|INTO|SET|WHERE|JOIN)\b)|(--|/\*|\*/|xp_|sp_)',
    re.IGNORECASE,
)

_OPTIONAL_TEXT = ('description', 'json', 'template', 'sql_str', 'sql_part')


def _check_sql(value, label):
    if DANGEROUS_SQL_PATTERN.search(value):
        raise BusinessRuleError(f"{label} contains potentially dangerous SQL patterns")
    if ';' in value and not value.rstrip().endswith(';'):
        raise BusinessRuleError(f"{label} contains suspicious semicolon usage")


class RuleNameService(CrudService):
    model = RuleName
    editable_fields = ('name', 'description', 'json', 'template', 'sql_str', 'sql_part')
    default_order = (RuleName.name.asc(),)

    def normalize(self, rule):
        """Trim every text field; blank optional fields become NULL."""
        if rule.name is not None:
            rule.name = rule.name.strip()
        for field in _OPTIONAL_TEXT:
            value = getattr(rule, field)
            if value is not None:
                value = value.strip()
                setattr(rule, field, value or None)

    def before_create(self, rule):
        self.normalize(rule)

    def before_update(self, rule):
        self.normalize(rule)

    def validate(self, rule):
        if not rule.name:
            raise BusinessRuleError("Rule name cannot be null or empty")
        if len(rule.name) > 125:
            raise BusinessRuleError("Rule name cannot exceed 125 characters")
        if not RULE_NAME_PATTERN.match(rule.name):
            raise BusinessRuleError(
                "Rule name must start with alphanumeric character and contain only "
                "alphanumeric characters, underscores, hyphens, and dots"
            )

        if rule.json:
            try:
                json.loads(rule.json)
            except ValueError as e:
                raise BusinessRuleError(f"Invalid JSON configuration: {e}") from e

        if rule.template and rule.template.count('{') != rule.template.count('}'):
            raise BusinessRuleError("Template has unbalanced placeholders (mismatched braces)")

        if rule.sql_str:
            _check_sql(rule.sql_str, "SQL string")
        if rule.sql_part:
            _check_sql(rule.sql_part, "SQL part")

        with self.session.no_autoflush:
            clash = self.find_by_name(rule.name)
        if clash is not None and clash.id != rule.id:
            raise BusinessRuleError(
                f"Rule name '{rule.name}' already exists. Each rule must have a unique name."
            )

    # ---- extra queries -----------------------------------------------
    def find_by_name(self, name):
        if not name or not name.strip():
            return None
        return self.session.query(RuleName).filter_by(name=name.strip()).first()

    def find_by_keyword(self, keyword):
        """Case-insensitive match on name or description, ordered by name."""
        if not keyword or not keyword.strip():
            return []
        pattern = f"%{keyword.strip()}%"
        return (
            self.session.query(RuleName)
            .filter(or_(RuleName.name.ilike(pattern), RuleName.description.ilike(pattern)))
            .order_by(RuleName.name.asc())
            .all()
        )
