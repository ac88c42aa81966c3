from pydantic import condecimal

# 18 integer digits plus cents, well inside the 28-digit decimal context
Money = condecimal(max_digits=20)
