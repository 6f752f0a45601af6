"""School Attendance package.

Feature modules (holidays, calendar, attendance, stats) each keep a thin Flask
controller on top of service/repository layers.
"""
