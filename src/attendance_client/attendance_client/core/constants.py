"""Constants and user-facing messages.

Note: Keep texts here to avoid literals spread across services and templates.
"""

DEFAULT_COURSE = "Inteligencia Artificial"

MSG_CONNECTION_ERROR = "Error de conexión"
MSG_LOGIN_OK = "Login Exitoso"
MSG_LOGIN_FAILED = "Error en login"
MSG_LOGOUT_FAILED = "Error al cerrar sesión"
MSG_SESSION_EXPIRED = "Su sesión ha expirado. Inicie sesión nuevamente."
MSG_UNKNOWN_ROLE = "Tipo de usuario desconocido"
MSG_GEO_UNSUPPORTED = "Geolocalización no soportada."
MSG_GEO_UNAVAILABLE = "No se pudo obtener la ubicación."
MSG_ATTENDANCE_FAILED = "Error al marcar asistencia"
MSG_REPORT_FAILED = "Error al obtener reporte"
MSG_UPDATE_FAILED = "Error al actualizar"
MSG_SELECT_DATE = "Por favor seleccione una fecha."
MSG_INVALID_DATE = "Fecha no válida."
MSG_INVALID_RESPONSE = "Respuesta inválida del servidor"
MSG_FORBIDDEN = "No tiene permisos para esta acción"

# Report categories in display order; chart values follow the same order.
REPORT_CATEGORIES = ("on_time", "late", "outside_campus", "absent")

CATEGORY_TITLES = {
    "on_time": "Asistieron Puntual (on_time)",
    "late": "Llegaron Tarde (late)",
    "outside_campus": "Intentaron desde Afuera (outside_campus)",
    "absent": "Faltaron (absent)",
}

CHART_TITLE = "Reporte de Asistencia"
CHART_DATASET_LABEL = "Cantidad"
CHART_LABELS = ("Puntual", "Tarde", "Desde Afuera", "Faltó")
CHART_COLORS = (
    "rgba(34, 197, 94, 0.7)",
    "rgba(249, 115, 22, 0.7)",
    "rgba(59, 130, 246, 0.7)",
    "rgba(239, 68, 68, 0.7)",
)

MODE_TITLES = {
    "all": "Registro General",
    "today": "Asistencia de Hoy",
}

NO_TIME_LABEL = "--:--"
