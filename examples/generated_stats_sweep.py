from ledgerstats.generate.bipartite import generate_bipartite_dag
from ledgerstats.stats.report import compute_report

# Average statistics of generated DAGs as the size grows.
for n in (10, 100, 1_000, 10_000):
    dag = generate_bipartite_dag(n, seed=n)
    report = compute_report(dag.graph())
    print(f"n={n}")
    print(report)
