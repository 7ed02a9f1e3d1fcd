# Backend/app/routes/rule_names.py

from flask import request

from Backend.app.mappers import rule_name_mapper
from Backend.app.routes.crud import CrudViews
from Backend.app.schemas import RuleNameForm


class RuleNameViews(CrudViews):
    def __init__(self, service):
        super().__init__('ruleName', service, rule_name_mapper, RuleNameForm, label="Rule")

    def load_records(self):
        keyword = request.args.get('q', '').strip()
        if keyword:
            return self.service.find_by_keyword(keyword)
        return self.service.find_all()

    def list_context(self):
        return {'q': request.args.get('q', '').strip()}


def create_rule_name_bp(service):
    return RuleNameViews(service).blueprint
