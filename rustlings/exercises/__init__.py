"""Worked solutions to the course exercises."""