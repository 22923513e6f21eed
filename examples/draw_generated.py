import matplotlib

matplotlib.use("Agg")

from ledgerstats.generate.bipartite import generate_bipartite_dag
from ledgerstats.viz.draw import draw_dag

if __name__ == "__main__":
    dag = generate_bipartite_dag(40, seed=7)
    draw_dag(dag.graph(), classes=dag.classes, save_path="bpdag_40.png")
    print("wrote bpdag_40.png")
