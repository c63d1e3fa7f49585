import numpy as np
import exactsimplex as es

A = np.array([[3, 1], [1, 3]])
b = [2, 2]
c = ['1', '1']
# html = es.tableau_to_html(es.from_standard_form(A, b, c))
decision = es.solve(es.from_standard_form(A, b, c, decision_prefix='y'), sink=lambda t: print(es.tableau_to_string(t), '\n'))
print(es.decision_to_string(decision))

try:
    es.solve(es.generate_tableau_from("1 -1 1 0 0 4\n2 0 0 1 0 10\n-1 -2 0 0 1 0"))
except es.NoPivotRow as e:
    print(e)
