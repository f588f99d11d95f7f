#!/usr/bin/env python3
"""
Cadastrar um administrador diretamente no banco configurado em DATABASE_URL.

Uso:
  python scripts/create_user.py --name "Maria" --email maria@exemplo.com --password 'Senha@123'
"""
from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from backoffice.core.errors import ApplicationError
from backoffice.db.create_tables import create_all
from backoffice.schemas.authentication import SignUpBody
from backoffice.services.auth_service import AuthService


def main() -> None:
    ap = argparse.ArgumentParser(description="Cadastrar usuario administrador")
    ap.add_argument("--name", required=True, help="Nome completo")
    ap.add_argument("--email", required=True, help="Email de acesso")
    ap.add_argument("--password", required=True, help="Senha (min. 8, 1 maiuscula, 1 numero, 1 especial)")
    args = ap.parse_args()

    try:
        payload = SignUpBody(name=args.name, email=args.email, password=args.password)
    except ValidationError as exc:
        messages = "; ".join(str(err["msg"]).removeprefix("Value error, ") for err in exc.errors())
        raise SystemExit(f"Dados invalidos: {messages}")

    create_all()
    result = AuthService().sign_up(payload)
    if isinstance(result, ApplicationError):
        raise SystemExit(f"{result.message} ({result.cause})")

    print("OK: usuario cadastrado")
    print(f"  ID: {result.id}")
    print(f"  Email: {result.email}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
