from gladtpc.hitdata import HitClusterData, HitData


def test_hit_defaults_are_zero():
    hit = HitData()
    assert (hit.x, hit.y, hit.z, hit.long_width, hit.energy, hit.time) == (
        0.0,
        0.0,
        0.0,
        0.0,
        0.0,
        0,
    )


def test_hit_keeps_given_values():
    hit = HitData(1.5, -2.0, 3.25, 0.5, 7.0)
    assert (hit.x, hit.y, hit.z, hit.long_width, hit.energy) == (1.5, -2.0, 3.25, 0.5, 7.0)


def test_cluster_defaults():
    cluster = HitClusterData()
    assert (cluster.x, cluster.y, cluster.z) == (-10000.0, -10000.0, -10000.0)
    assert cluster.energy == 0.0
    assert cluster.length == -999.0
    assert cluster.cluster_id == -1


def test_cluster_covariance_is_zero_three_by_three():
    cluster = HitClusterData()
    assert len(cluster.cov_matrix) == 3
    assert all(row == [0.0, 0.0, 0.0] for row in cluster.cov_matrix)


def test_cluster_covariances_are_independent():
    first = HitClusterData()
    second = HitClusterData()
    first.cov_matrix[1][2] = 4.0
    assert second.cov_matrix[1][2] == 0.0


def test_cluster_is_a_hit():
    cluster = HitClusterData(cluster_id=7)
    cluster.energy = 2.5
    assert isinstance(cluster, HitData)
    assert cluster.energy == 2.5
    assert cluster.cluster_id == 7