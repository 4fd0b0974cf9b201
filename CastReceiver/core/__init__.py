# 12.10.26
