# main.py - Command line entry point for account management and report exports
import argparse
import getpass
import logging
import os
import sys

from config import APP_CONFIG, ASSET_CONFIG, REPORT_CONFIG

# Setup logging
from logging_setup import setup_logging
setup_logging()
logger = logging.getLogger(__name__)

from auth import ValidationError
from auth.config import MESSAGES
from database import (
    AccountConflictError,
    create_admin_account,
    create_tables,
    delete_admin,
    get_all_admins,
    get_periods_by_career,
    get_teachers_by_career,
    list_admins,
)
from pdf_generators import (
    MissingAssetError,
    RenderError,
    ReportType,
    REPORT_FILENAMES,
    export_admins,
    export_periods,
    export_teachers,
    load_assets,
)


def load_assets_or_exit():
    """Load fonts and logos once; the process cannot serve exports without them"""
    try:
        return load_assets(ASSET_CONFIG['root'])
    except MissingAssetError as e:
        logger.critical(f"Cannot start report generation, missing asset: {e.path}")
        sys.exit(1)


def write_report(pdf_bytes, report_type, output=None):
    output = output or os.path.join(REPORT_CONFIG['output_dir'], REPORT_FILENAMES[report_type])
    directory = os.path.dirname(output)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output, 'wb') as f:
        f.write(pdf_bytes)
    logger.info(f"Report written to {output}")
    return output


def cmd_init_db(args):
    create_tables()
    print("Database ready")


def cmd_create_admin(args):
    password = args.password or getpass.getpass("Contraseña: ")
    try:
        admin = create_admin_account(args.nombre, args.correo, password, args.carrera)
    except (ValidationError, AccountConflictError) as e:
        print(str(e), file=sys.stderr)
        return 1
    print(f"{MESSAGES['admin_created']}: {admin['nombre']} <{admin['correo']}>")
    return 0


def cmd_list_admins(args):
    result = list_admins(args.search, args.page, args.page_size)
    if not result["success"]:
        print(result["message"])
        return 1
    for admin in result["admins"]:
        print(f"{admin['id']:>4}  {admin['nombre']:<35} {admin['correo']:<35} {admin['fechaRegistro']}")
    print(f"Página {result['currentPage']} de {result['totalPages']} ({result['totalItems']} administradores)")
    return 0


def cmd_delete_admin(args):
    if not delete_admin(args.id):
        print(MESSAGES["admin_not_found"], file=sys.stderr)
        return 1
    print(MESSAGES["admin_deleted"])
    return 0


def cmd_export_admins(args):
    assets = load_assets_or_exit()
    pdf_bytes = export_admins(get_all_admins(), assets)
    print(write_report(pdf_bytes, ReportType.ADMINISTRATORS, args.output))
    return 0


def cmd_export_teachers(args):
    assets = load_assets_or_exit()
    pdf_bytes = export_teachers(get_teachers_by_career(args.carrera), args.carrera, assets)
    print(write_report(pdf_bytes, ReportType.TEACHERS, args.output))
    return 0


def cmd_export_periods(args):
    assets = load_assets_or_exit()
    pdf_bytes = export_periods(get_periods_by_career(args.carrera), assets)
    print(write_report(pdf_bytes, ReportType.PERIODS, args.output))
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description=f"{APP_CONFIG['app_name']} {APP_CONFIG['version']}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sub = subparsers.add_parser("init-db", help="Create the database tables")
    sub.set_defaults(func=cmd_init_db)

    sub = subparsers.add_parser("create-admin", help="Register an administrator")
    sub.add_argument("--nombre", required=True)
    sub.add_argument("--correo", required=True)
    sub.add_argument("--carrera")
    sub.add_argument("--password", help="Prompted for when omitted")
    sub.set_defaults(func=cmd_create_admin)

    sub = subparsers.add_parser("list-admins", help="Search administrators by name or email")
    sub.add_argument("--search", default="")
    sub.add_argument("--page", type=int, default=1)
    sub.add_argument("--page-size", type=int, default=10)
    sub.set_defaults(func=cmd_list_admins)

    sub = subparsers.add_parser("delete-admin", help="Delete an administrator")
    sub.add_argument("id", type=int)
    sub.set_defaults(func=cmd_delete_admin)

    sub = subparsers.add_parser("export-admins", help="Export all administrators to PDF")
    sub.add_argument("--output")
    sub.set_defaults(func=cmd_export_admins)

    sub = subparsers.add_parser("export-teachers", help="Export the teachers of a career to PDF")
    sub.add_argument("--carrera", required=True)
    sub.add_argument("--output")
    sub.set_defaults(func=cmd_export_teachers)

    sub = subparsers.add_parser("export-periods", help="Export the periods of a career to PDF")
    sub.add_argument("--carrera", required=True)
    sub.add_argument("--output")
    sub.set_defaults(func=cmd_export_periods)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        create_tables()
        return args.func(args) or 0
    except RenderError as e:
        logger.error(f"Report generation failed: {e}")
        print("No se pudo generar el documento", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
