# auth/config.py
"""Account validation constants and messages"""

MIN_PASSWORD_LENGTH = 8
BCRYPT_ROUNDS = 12

EMAIL_PATTERN = r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"

# Messages returned to the caller
MESSAGES = {
    "name_required": "El nombre es obligatorio",
    "email_required": "El correo es obligatorio",
    "email_invalid": "El correo no tiene un formato válido",
    "password_required": "La contraseña es obligatoria",
    "password_too_short": f"La contraseña debe tener al menos {MIN_PASSWORD_LENGTH} caracteres",
    "email_taken_admin": "Este correo ya pertenece a una cuenta registrada",
    "email_taken_teacher": (
        "El correo esta asociado a una cuenta de docente, los correos para administradores "
        "deben ser los de coordinacion. Ej: sistemas@dominio, gestion@dominio"
    ),
    "admin_created": "Administrador registrado",
    "admin_deleted": "Administrador eliminado",
    "admin_not_found": "Usuario no eliminado, debido a que no existe",
    "no_admins_found": "No se encontraron administradores con ese criterio de búsqueda",
}
