import logging
import exactsimplex as es
logging.basicConfig(level=logging.INFO)

# x1 + x2 <= 12, 2 x1 + x2 <= 16, max 40 x1 + 30 x2
tableau = es.generate_tableau_from("""
1 1 1 0 0 12
2 1 0 1 0 16
-40 -30 0 0 1 0
""")
snapshots = []
decision = es.solve(tableau, sink=snapshots.append)
for i, snapshot in enumerate(snapshots):
    print('Tableau ' + str(i + 1))
    print(es.tableau_to_string(snapshot))
print('Decision')
print(es.decision_to_string(decision))
