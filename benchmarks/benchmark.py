import random
import time
from pyinstrument import Profiler
from sorted_intersect import OrderedSet, intersect_update_merge, intersect_update_probe, choose_variant

def make_pair(len_ac, len_bc, seed=0):
    rnd = random.Random(seed)
    universe = range(len_ac * 4)
    ac = OrderedSet(rnd.sample(universe, len_ac))
    bc = sorted(rnd.choices(universe, k=len_bc))
    return ac, bc

def time_variant(fn, ac, bc, rounds):
    total = 0.0
    for _ in range(rounds):
        target = bc[:]
        t0 = time.perf_counter()
        fn(ac, target)
        total += time.perf_counter() - t0
    return total * 1000 / rounds

def benchmark_skewed():
    shapes = [(1_000, 1_000), (100_000, 1_000), (1_000_000, 100)]
    rounds = 5
    for len_ac, len_bc in shapes:
        ac, bc = make_pair(len_ac, len_bc)
        merge_ms = time_variant(intersect_update_merge, ac, bc, rounds)
        probe_ms = time_variant(intersect_update_probe, ac, bc, rounds)
        print(f"|ac|={len_ac:>9} |bc|={len_bc:>6}  merge {merge_ms:8.3f} ms  probe {probe_ms:8.3f} ms"
              f"  chosen: {choose_variant(ac, bc)}")

    ac, bc = make_pair(1_000_000, 100)
    profiler = Profiler()
    profiler.start()
    for _ in range(rounds):
        intersect_update_merge(ac, bc[:])
        intersect_update_probe(ac, bc[:])
    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("intersect_profile.html", "w") as f:
        f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_skewed()
