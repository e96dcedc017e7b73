# payroll_app/holidays/data.py

from payroll_app.models import HolidayType

REGULAR = HolidayType.REGULAR
SPECIAL = HolidayType.SPECIAL_NON_WORKING

# Proclaimed national holidays, keyed by year.
# Each entry: {'name', 'date' (ISO string or datetime.date), 'type'}.
DEFAULT_HOLIDAY_TABLE = {
    2024: [
        {'name': "New Year's Day", 'date': '2024-01-01', 'type': REGULAR},
        {'name': 'Additional Special Day', 'date': '2024-02-09', 'type': SPECIAL},
        {'name': 'Chinese New Year', 'date': '2024-02-10', 'type': SPECIAL},
        {'name': 'Maundy Thursday', 'date': '2024-03-28', 'type': REGULAR},
        {'name': 'Good Friday', 'date': '2024-03-29', 'type': REGULAR},
        {'name': 'Black Saturday', 'date': '2024-03-30', 'type': SPECIAL},
        {'name': 'Araw ng Kagitingan', 'date': '2024-04-09', 'type': REGULAR},
        {'name': "Eid'l Fitr", 'date': '2024-04-10', 'type': REGULAR},
        {'name': 'Labor Day', 'date': '2024-05-01', 'type': REGULAR},
        {'name': 'Independence Day', 'date': '2024-06-12', 'type': REGULAR},
        {'name': "Eid'l Adha", 'date': '2024-06-17', 'type': REGULAR},
        {'name': 'Ninoy Aquino Day', 'date': '2024-08-23', 'type': SPECIAL},
        {'name': 'National Heroes Day', 'date': '2024-08-26', 'type': REGULAR},
        {'name': "All Saints' Day", 'date': '2024-11-01', 'type': SPECIAL},
        {'name': "All Souls' Day", 'date': '2024-11-02', 'type': SPECIAL},
        {'name': 'Bonifacio Day', 'date': '2024-11-30', 'type': REGULAR},
        {'name': 'Feast of the Immaculate Conception', 'date': '2024-12-08', 'type': SPECIAL},
        {'name': 'Christmas Eve', 'date': '2024-12-24', 'type': SPECIAL},
        {'name': 'Christmas Day', 'date': '2024-12-25', 'type': REGULAR},
        {'name': 'Rizal Day', 'date': '2024-12-30', 'type': REGULAR},
        {'name': 'Last Day of the Year', 'date': '2024-12-31', 'type': SPECIAL},
    ],
    2025: [
        {'name': "New Year's Day", 'date': '2025-01-01', 'type': REGULAR},
        {'name': 'Chinese New Year', 'date': '2025-01-29', 'type': SPECIAL},
        {'name': 'Araw ng Kagitingan', 'date': '2025-04-09', 'type': REGULAR},
        {'name': 'Maundy Thursday', 'date': '2025-04-17', 'type': REGULAR},
        {'name': 'Good Friday', 'date': '2025-04-18', 'type': REGULAR},
        {'name': 'Black Saturday', 'date': '2025-04-19', 'type': SPECIAL},
        {'name': 'Labor Day', 'date': '2025-05-01', 'type': REGULAR},
        {'name': 'Independence Day', 'date': '2025-06-12', 'type': REGULAR},
        {'name': 'Ninoy Aquino Day', 'date': '2025-08-21', 'type': SPECIAL},
        {'name': 'National Heroes Day', 'date': '2025-08-25', 'type': REGULAR},
        {'name': "All Saints' Day Eve", 'date': '2025-10-31', 'type': SPECIAL},
        {'name': "All Saints' Day", 'date': '2025-11-01', 'type': SPECIAL},
        {'name': 'Bonifacio Day', 'date': '2025-11-30', 'type': REGULAR},
        {'name': 'Feast of the Immaculate Conception', 'date': '2025-12-08', 'type': SPECIAL},
        {'name': 'Christmas Eve', 'date': '2025-12-24', 'type': SPECIAL},
        {'name': 'Christmas Day', 'date': '2025-12-25', 'type': REGULAR},
        {'name': 'Rizal Day', 'date': '2025-12-30', 'type': REGULAR},
        {'name': 'Last Day of the Year', 'date': '2025-12-31', 'type': SPECIAL},
    ],
}
