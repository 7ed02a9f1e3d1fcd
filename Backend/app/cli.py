#!/usr/bin/env python
"""
Backend/app/cli.py

poseidon-create-user: bootstrap an account from the command line.

- Loads the environment and builds the app through the usual factory
- Ensures all tables exist (db.create_all())
- Validates the input with the same schema as the admin user form
- Exits with 0 on success, non-zero on failure
"""

import argparse
import getpass
import sys

from Backend.app import create_app, db
from Backend.app.exceptions import BusinessRuleError, FormValidationError, StoreError
from Backend.app.mappers import user_mapper
from Backend.app.schemas import UserForm


def build_parser():
    parser = argparse.ArgumentParser(
        prog='poseidon-create-user',
        description="Create a Poseidon user account.",
    )
    parser.add_argument('username')
    parser.add_argument('fullname')
    parser.add_argument('--role', choices=('USER', 'ADMIN'), default='USER')
    parser.add_argument('--password', help="prompted for when omitted")
    return parser


def main(argv=None, app=None):
    args = build_parser().parse_args(argv)
    password = args.password or getpass.getpass("Password: ")

    app = app or create_app()
    with app.app_context():
        db.create_all()
        service = app.extensions['poseidon_services']['user']
        try:
            form = UserForm.from_form({
                'username': args.username,
                'password': password,
                'fullname': args.fullname,
                'role':     args.role,
            })
            user = service.create(user_mapper.to_entity(form))
        except FormValidationError as e:
            for field, message in e.errors.items():
                print(f"{field}: {message}", file=sys.stderr)
            return 1
        except (BusinessRuleError, StoreError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        print(f"Created {user.role} user '{user.username}' (id={user.id})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
