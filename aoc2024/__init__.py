# AoC 2024 - Reference Solutions
