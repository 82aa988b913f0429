"""Worked Python solutions to many of the exercises."""